"""Tests for parser configuration."""

import pytest
from privfields import parse, parse_with_diagnostics
from privfields.options import Options


class TestOptions:
    def test_defaults(self):
        opts = Options()
        assert opts.ecma_version == 13
        assert opts.allow_reserved is True
        assert opts.source_type == "script"

    def test_year_normalised(self):
        assert Options(ecma_version=2017).ecma_version == 8
        assert Options(ecma_version=8).ecma_version == 8

    @pytest.mark.parametrize("version", [5, 2014, 2030])
    def test_unsupported_version(self, version):
        with pytest.raises(ValueError):
            Options(ecma_version=version)

    def test_invalid_allow_reserved(self):
        with pytest.raises(ValueError):
            Options(allow_reserved="sometimes")

    def test_invalid_source_type(self):
        with pytest.raises(ValueError):
            Options(source_type="commonjs")

    def test_from_mapping_ignores_unknown(self):
        opts = Options.from_mapping({"ecma_version": 2020, "locations": True})
        assert opts.ecma_version == 11

    def test_from_empty_mapping(self):
        assert Options.from_mapping(None) == Options()

    def test_parse_accepts_instance_or_keywords(self):
        parse("class A { static x = 1; }", Options(ecma_version=2017))
        parse("class A { static x = 1; }", ecma_version=2017)

    def test_parse_rejects_instance_and_keywords(self):
        with pytest.raises(TypeError):
            parse("1;", Options(), ecma_version=2017)

    def test_module_code_is_strict(self):
        _, diagnostics = parse_with_diagnostics("var public = 1;", source_type="module")
        assert len(diagnostics) == 1
