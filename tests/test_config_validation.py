"""Tests for configuration loading and validation."""

import pytest
from pathlib import Path
import tempfile
import yaml

from locale_checker.utils.config import (
    CONFIG_FILE_NAME,
    MISSING_BUNDLE_POLICIES,
    MissingBundlePolicy,
    Config,
    ConfigValidationError,
    ConfigValidationWarning,
    PathsConfig,
    CheckConfig,
    ReportsConfig,
)


class TestConfigValidation:
    """Test cases for Config.validate() method."""

    def test_valid_default_config(self):
        """Default config should pass validation."""
        errors, warnings = Config().validate()

        assert errors == []
        assert warnings == []

    @pytest.mark.parametrize('policy', ['forbid', 'allow', 'create'])
    def test_valid_policies(self, policy):
        config = Config()
        config.check.missing_bundle = policy

        errors, _ = config.validate()

        assert errors == []

    def test_invalid_policy(self):
        config = Config()
        config.check.missing_bundle = 'sometimes'

        errors, _ = config.validate()

        assert len(errors) == 1
        assert "Invalid missing bundle policy 'sometimes'" in errors[0]

    @pytest.mark.parametrize('ext', ['properties', '.', '', None])
    def test_invalid_bundle_ext(self, ext):
        config = Config()
        config.paths.bundle_ext = ext

        errors, _ = config.validate()

        assert len(errors) == 1
        assert 'paths.bundle_ext' in errors[0]

    def test_invalid_template_ext(self):
        config = Config()
        config.paths.template_ext = 'dust'

        errors, _ = config.validate()

        assert any('paths.template_ext' in error for error in errors)

    @pytest.mark.parametrize('depth', [0, -1, '2', None])
    def test_invalid_locale_depth(self, depth):
        config = Config()
        config.paths.locale_depth = depth

        errors, _ = config.validate()

        assert len(errors) == 1
        assert 'locale_depth' in errors[0]

    @pytest.mark.parametrize('pattern', ['', '   ', 3])
    def test_invalid_ignore_pattern(self, pattern):
        config = Config()
        config.check.ignore = ['locales/xx', pattern]

        errors, _ = config.validate()

        assert len(errors) == 1
        assert 'Invalid ignore pattern' in errors[0]

    def test_empty_tree_modes(self):
        config = Config()
        config.check.tree_modes = []

        errors, _ = config.validate()

        assert errors == ["check.tree_modes cannot be empty"]

    @pytest.mark.parametrize('section, name, value', [
        ('check', 'tree_modes', 'paired'),
        ('check', 'ignore', 'locales/fr/*'),
        ('reports', 'formats', 'json'),
        ('check', 'tree_modes', None),
    ])
    def test_list_option_given_as_scalar(self, section, name, value):
        """A single string is not accepted where a list is expected."""
        config = Config()
        setattr(getattr(config, section), name, value)

        errors, _ = config.validate()

        assert len(errors) == 1
        assert errors[0].startswith(f"{section}.{name} must be a list")

    @pytest.mark.parametrize('mode', ['', ' ', 1])
    def test_invalid_tree_mode(self, mode):
        config = Config()
        config.check.tree_modes = ['paired', mode]

        errors, _ = config.validate()

        assert errors == [f"Invalid tree mode: {mode!r}"]

    @pytest.mark.parametrize('fmt', ['', None])
    def test_invalid_report_format(self, fmt):
        config = Config()
        config.reports.formats = ['console', fmt]

        errors, warnings = config.validate()

        assert errors == [f"Invalid report format: {fmt!r}"]
        assert warnings == []

    def test_tree_modes_from_file_stay_whole(self):
        """A valid list of modes is used as-is by the checker."""
        config = Config.from_dict({'check': {'tree_modes': ['paired']}})

        errors, _ = config.validate()

        assert errors == []
        assert config.check.tree_modes == ['paired']

    def test_policy_names_match_enum(self):
        assert list(MISSING_BUNDLE_POLICIES) == MissingBundlePolicy.choices()
        assert MissingBundlePolicy('create') == MissingBundlePolicy.CREATE

    def test_multiple_errors(self):
        config = Config()
        config.check.missing_bundle = 'never'
        config.paths.locale_depth = 0

        errors, _ = config.validate()

        assert len(errors) == 2

    def test_missing_directories_warn(self):
        """Missing template or bundle roots are warnings, not errors."""
        with tempfile.TemporaryDirectory() as tmpdir:
            errors, warnings = Config().validate(project_dir=Path(tmpdir))

            assert errors == []
            assert len(warnings) == 2
            assert all(isinstance(w, ConfigValidationWarning) for w in warnings)
            assert 'Templates directory does not exist' in str(warnings[0])
            assert 'Bundles directory does not exist' in str(warnings[1])

    def test_existing_directories(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / 'public' / 'templates').mkdir(parents=True)
            (Path(tmpdir) / 'locales').mkdir()

            errors, warnings = Config().validate(project_dir=Path(tmpdir))

            assert errors == []
            assert warnings == []

    def test_unknown_report_format(self):
        config = Config()
        config.reports.formats = ['console', 'html']

        errors, warnings = config.validate()

        assert errors == []
        assert len(warnings) == 1
        assert "Unknown report format: 'html'" in str(warnings[0])

    def test_raise_on_error(self):
        config = Config()
        config.check.missing_bundle = 'never'

        with pytest.raises(ConfigValidationError) as exc_info:
            config.validate(raise_on_error=True)

        assert len(exc_info.value.errors) == 1
        assert 'never' in str(exc_info.value)

    def test_raise_on_error_with_valid_config(self):
        errors, _ = Config().validate(raise_on_error=True)

        assert errors == []


class TestConfigLoading:
    """Test cases for loading configuration."""

    def test_defaults(self):
        config = Config()

        assert config.paths == PathsConfig()
        assert config.paths.templates == 'public/templates'
        assert config.paths.template_ext == '.dust'
        assert config.paths.bundles == 'locales'
        assert config.paths.bundle_ext == '.properties'
        assert config.paths.locale_depth == 1
        assert config.check == CheckConfig()
        assert config.check.missing_bundle == 'allow'
        assert config.check.tree_modes == ['paired', 'json']
        assert config.reports == ReportsConfig()

    def test_from_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / 'custom.yml'
            config_path.write_text(yaml.dump({
                'paths': {'templates': 'views', 'locale_depth': 2},
                'check': {'missing_bundle': 'forbid', 'ignore': ['locales/xx']},
            }))

            config = Config.from_file(config_path)

            assert config.paths.templates == 'views'
            assert config.paths.locale_depth == 2
            assert config.paths.bundles == 'locales'
            assert config.check.missing_bundle == 'forbid'
            assert config.check.ignore == ['locales/xx']
            assert config.reports.formats == ['console']

    def test_from_project_dir(self):
        """The config file is looked up in the project directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / CONFIG_FILE_NAME).write_text('check:\n  missing_bundle: create\n')

            config = Config.from_file(project_dir=Path(tmpdir))

            assert config.check.missing_bundle == 'create'

    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config = Config.from_file(project_dir=Path(tmpdir))

            assert config == Config()

    def test_missing_explicit_file_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(OSError):
                Config.from_file(Path(tmpdir) / 'missing.yml')

    def test_empty_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / CONFIG_FILE_NAME
            config_path.write_text('')

            assert Config.from_file(config_path) == Config()

    def test_unknown_key_raises(self):
        with pytest.raises(TypeError):
            Config.from_dict({'check': {'missing': 'allow'}})

    @pytest.mark.parametrize('data', [['a', 'b'], 'just a string', 3])
    def test_non_mapping_document_raises(self, data):
        with pytest.raises(ValueError) as exc_info:
            Config.from_dict(data)

        assert 'config must be a mapping' in str(exc_info.value)

    @pytest.mark.parametrize('section', ['paths', 'check', 'reports'])
    def test_non_mapping_section_raises(self, section):
        with pytest.raises(ValueError) as exc_info:
            Config.from_dict({section: ['a']})

        assert f"config section '{section}'" in str(exc_info.value)

    def test_list_document_in_file_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / CONFIG_FILE_NAME
            config_path.write_text('- a\n- b\n')

            with pytest.raises(ValueError):
                Config.from_file(config_path)

    def test_to_dict_round_trip(self):
        config = Config()
        config.check.ignore = ['public/templates/vendor/*']
        config.paths.locale_depth = 2

        data = config.to_dict()

        assert data['check']['ignore'] == ['public/templates/vendor/*']
        assert data['paths']['locale_depth'] == 2
        assert Config.from_dict(data) == config

    def test_to_dict_is_yaml_serializable(self):
        data = Config().to_dict()

        assert yaml.safe_load(yaml.dump(data)) == data


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
