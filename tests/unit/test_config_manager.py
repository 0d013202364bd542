"""Unit tests for configuration management"""
from pathlib import Path

import pytest
from bddgen.core.config_manager import ConfigManager, GeneratorConfig
from bddgen.utils.errors import ConfigurationError


@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / 'environments').mkdir()
    (tmp_path / 'config.yaml').write_text(
        'paths:\n'
        '  features: specs\n'
        '  output: generated\n'
        'generator:\n'
        '  target: playwright-js\n'
        'logging:\n'
        '  level: INFO\n'
    )
    return tmp_path


def test_defaults_without_config_file(tmp_path):
    manager = ConfigManager(tmp_path / 'missing.yaml', 'dev')
    manager.load_config()

    config = manager.to_generator_config(tmp_path)

    assert config == GeneratorConfig.from_base_dir(tmp_path)
    assert config.features_dir == tmp_path / 'features'
    assert config.output_dir == tmp_path / 'tests'
    assert config.target == 'playwright-js'


def test_paths_resolved_against_base_dir(config_dir):
    manager = ConfigManager(config_dir / 'config.yaml', 'dev')
    manager.load_config()

    config = manager.to_generator_config(Path('/project'))

    assert config.features_dir == Path('/project/specs')
    assert config.output_dir == Path('/project/generated')


def test_environment_overlay_and_overrides(config_dir):
    (config_dir / 'environments' / 'ci.yaml').write_text(
        'overrides:\n'
        '  generator:\n'
        '    target: pytest-playwright\n'
        'logging:\n'
        '  level: DEBUG\n'
    )
    manager = ConfigManager(config_dir / 'config.yaml', 'ci')
    manager.load_config()

    assert manager.get('generator.target') == 'pytest-playwright'
    assert manager.get('generator.feature_extension') == '.feature'
    assert manager.get('logging.level') == 'DEBUG'
    assert manager.get('paths.features') == 'specs'


def test_env_var_substitution(config_dir, monkeypatch):
    monkeypatch.setenv('BDDGEN_TEST_OUTPUT', 'from-env')
    (config_dir / 'environments' / 'dev.yaml').write_text('paths:\n  output: ${BDDGEN_TEST_OUTPUT}\n')
    manager = ConfigManager(config_dir / 'config.yaml', 'dev')
    manager.load_config()

    assert manager.get('paths.output') == 'from-env'


def test_get_with_default(config_dir):
    manager = ConfigManager(config_dir / 'config.yaml', 'dev')
    manager.load_config()

    assert manager.get('paths.nothing.here', 'fallback') == 'fallback'


def test_target_argument_wins(config_dir):
    manager = ConfigManager(config_dir / 'config.yaml', 'dev')
    manager.load_config()

    assert manager.to_generator_config(config_dir, 'pytest-playwright').target == 'pytest-playwright'


def test_unknown_target_rejected(config_dir):
    (config_dir / 'environments' / 'dev.yaml').write_text('generator:\n  target: cypress\n')
    manager = ConfigManager(config_dir / 'config.yaml', 'dev')
    manager.load_config()

    with pytest.raises(ConfigurationError):
        manager.to_generator_config(config_dir)


def test_invalid_yaml(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('paths: [unclosed\n')

    with pytest.raises(ConfigurationError):
        ConfigManager(path, 'dev').load_config()


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('- just\n- a list\n')

    with pytest.raises(ConfigurationError):
        ConfigManager(path, 'dev').load_config()


def test_defaults_are_not_mutated(config_dir):
    (config_dir / 'environments' / 'ci.yaml').write_text('overrides:\n  paths:\n    features: changed\n')
    ConfigManager(config_dir / 'config.yaml', 'ci').load_config()

    fresh = ConfigManager(config_dir / 'missing.yaml', 'none')
    fresh.load_config()

    assert fresh.get('paths.features') == 'features'
