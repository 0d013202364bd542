"""
Script generator
Renders parsed features into Playwright test modules through Jinja2 templates
"""

from pathlib import Path
from typing import Dict, List, Optional
from dataclasses import dataclass

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from bddgen.parser.feature_parser import Feature
from bddgen.parser.step_mapper import StepMapper
from bddgen.utils.errors import ConfigurationError
from bddgen.utils.helpers import css_text, js_string, py_string, to_class_name, to_identifier
from bddgen.utils.logger import setup_logger

logger = setup_logger(__name__)

TEMPLATE_DIR = Path(__file__).parent / 'templates'


@dataclass(frozen=True)
class Target:
    """An output flavour: template, file naming and how to run the result"""
    name: str
    template: str
    file_pattern: str
    run_hint: str


TARGETS: Dict[str, Target] = {
    'playwright-js': Target(
        name='playwright-js',
        template='playwright_js.j2',
        file_pattern='{stem}.spec.js',
        run_hint='npx playwright test',
    ),
    'pytest-playwright': Target(
        name='pytest-playwright',
        template='pytest_playwright.j2',
        file_pattern='test_{stem}.py',
        run_hint='pytest --browser chromium',
    ),
}

DEFAULT_TARGET = 'playwright-js'


def get_target(name: str) -> Target:
    try:
        return TARGETS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown target '{name}', expected one of: {', '.join(sorted(TARGETS))}"
        ) from None


def has_text_selector(label: str) -> str:
    """Selector matching a button or link by its visible text"""
    text = css_text(label)
    return f'button:has-text("{text}"), a:has-text("{text}")'


LINE_BREAKERS = {
    '\r': '\\r',
    '\x00': '\\x00',
    '\u2028': '\\u2028',
    '\u2029': '\\u2029',
}


def line_comment(text: str) -> str:
    """Keep text on a single comment line in JavaScript and Python"""
    text = str(text)
    for char, escape in LINE_BREAKERS.items():
        text = text.replace(char, escape)
    return text


def py_docstring(text: str) -> str:
    escaped = line_comment(str(text).replace('\\', '\\\\').replace('"', '\\"'))
    return f'"""{escaped}"""'


def _create_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,
    )
    env.filters['js'] = js_string
    env.filters['py'] = py_string
    env.filters['docstring'] = py_docstring
    env.filters['comment'] = line_comment
    env.filters['has_text_selector'] = has_text_selector
    return env


class ScriptGenerator:
    """Generates one test module per feature"""

    def __init__(self, target: str = DEFAULT_TARGET, step_mapper: Optional[StepMapper] = None):
        self.target = get_target(target)
        self.step_mapper = step_mapper or StepMapper()
        self.env = _create_environment()

    def output_name(self, source: Path, extension: str = '.feature') -> str:
        """File name of the module generated for a feature document"""
        name = Path(source).name
        stem = name[:-len(extension)] if extension and name.endswith(extension) else Path(name).stem
        return self.target.file_pattern.format(stem=stem)

    def emit(self, feature: Feature) -> str:
        """Render the test module for a feature"""
        template = self.env.get_template(self.target.template)
        return template.render(
            feature=feature,
            class_name=f"Test{to_class_name(feature.title)}",
            cases=self._build_cases(feature),
        )

    def _build_cases(self, feature: Feature) -> List[Dict]:
        cases = []
        used = set()

        for scenario in feature.scenarios:
            base = method = to_identifier(scenario.name)
            suffix = 1
            while method in used:
                suffix += 1
                method = f"{base}_{suffix}"
            used.add(method)

            blocks = [self.step_mapper.translate(step) for step in scenario.steps]
            unrecognized = sum(1 for b in blocks if b.intent == StepMapper.UNRECOGNIZED)
            if unrecognized:
                logger.debug(f"Scenario '{scenario.name}': {unrecognized} step(s) need manual implementation")

            cases.append({'name': scenario.name, 'method': method, 'blocks': blocks})

        return cases


def emit(feature: Feature, target: str = DEFAULT_TARGET) -> str:
    """Render a feature with a fresh generator"""
    return ScriptGenerator(target).emit(feature)
