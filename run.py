#!/usr/bin/env python3
"""
bddgen - BDD to Playwright test generator
Converts Given/When/Then feature files in features/ into test skeletons in tests/
"""

import sys
from pathlib import Path

import click

from bddgen import __version__
from bddgen.core.config_manager import ConfigManager
from bddgen.executor.generation_executor import GenerationExecutor
from bddgen.generator.script_generator import TARGETS
from bddgen.utils.errors import BddGenError
from bddgen.utils.logger import setup_logger, set_log_level

PROJECT_ROOT = Path(__file__).resolve().parent

# Initialize logger
logger = setup_logger(__name__)


@click.command()
@click.argument('feature_file', required=False)
@click.option('--config', '-c', default=str(PROJECT_ROOT / 'config' / 'config.yaml'),
              help='Path to config file')
@click.option('--env', '-e', default='dev', help='Environment overlay to apply')
@click.option('--target', '-t', type=click.Choice(sorted(TARGETS)), default=None,
              help='Output flavour (overrides generator.target)')
def main(feature_file, config, env, target):
    """
    Generate Playwright tests from BDD feature files

    Examples:
        # Process every feature file in features/
        python run.py

        # Process a single feature file
        python run.py login.feature
    """

    try:
        config_manager = ConfigManager(config, env)
        config_manager.load_config()
        generator_config = config_manager.to_generator_config(PROJECT_ROOT, target)
        set_log_level(generator_config.log_level)

        logger.info(f"Starting bddgen v{__version__} (target: {generator_config.target})")

        executor = GenerationExecutor(generator_config)
        executor.run(feature_file)

    except (BddGenError, OSError, ValueError) as e:
        logger.error(f"Generation failed: {str(e)}")
        sys.exit(1)


if __name__ == '__main__':
    main()
