"""Unit tests for the console helpers (laravel_package_cli.utils)."""

from __future__ import annotations

import pytest

from laravel_package_cli.utils import (
    print_error,
    print_generation_summary,
    print_header,
    print_stage,
    print_success,
    print_warning,
)


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_header(self, capsys):
        print_header("Scaffolding acme/blog")
        assert "Scaffolding acme/blog" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_stage(self, capsys):
        print_stage("Generating base files")
        assert "Generating base files" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_success(self, capsys):
        print_success("Package created")
        assert "Package created" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_error(self, capsys):
        print_error("Something failed")
        assert "Something failed" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_warning(self, capsys):
        print_warning("Check your license")
        assert "Check your license" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_generation_summary(self, make_generator, capsys):
        result = make_generator("dummy/pkg").generate()
        result.skipped.append("config")
        print_generation_summary(result)

        out = capsys.readouterr().out
        assert "dummy/pkg" in out
        assert "pkg/README.md" in out
        assert "empty" in out
        assert "Skipped: config" in out
