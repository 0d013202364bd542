"""
Feature parser
Extracts the feature title, description and scenarios from Given/When/Then documents
"""

from pathlib import Path
from typing import List, Optional, Tuple
from dataclasses import dataclass, field

from bddgen.utils.errors import DocumentReadError
from bddgen.utils.logger import setup_logger

logger = setup_logger(__name__)

FEATURE_PREFIX = 'Feature:'
SCENARIO_PREFIX = 'Scenario:'
STEP_PREFIXES = ('Given ', 'When ', 'Then ', 'And ', 'But ')
COMMENT_PREFIX = '#'


@dataclass(frozen=True)
class Scenario:
    name: str
    steps: Tuple[str, ...] = ()


@dataclass
class Feature:
    title: str
    description: str
    scenarios: List[Scenario] = field(default_factory=list)
    file_path: str = ""

    def is_valid(self) -> bool:
        """A feature is emitted only with a title and at least one scenario"""
        return bool(self.title) and bool(self.scenarios)


def extract(document_text: str) -> Feature:
    """Parse a scenario document into a Feature"""
    title = ''
    description: List[str] = []
    scenarios: List[Scenario] = []
    current_name: Optional[str] = None
    current_steps: List[str] = []

    for line in document_text.split('\n'):
        line = line.strip()

        # Skip empty lines and comments
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        if line.startswith(FEATURE_PREFIX):
            # First non-empty title wins
            if not title:
                title = line[len(FEATURE_PREFIX):].strip()

        elif line.startswith(SCENARIO_PREFIX):
            if current_name is not None:
                scenarios.append(Scenario(current_name, tuple(current_steps)))
            current_name = line[len(SCENARIO_PREFIX):].strip()
            current_steps = []

        elif current_name is not None and line.startswith(STEP_PREFIXES):
            current_steps.append(line)

        elif not title:
            description.append(line)

    # Add last scenario
    if current_name is not None:
        scenarios.append(Scenario(current_name, tuple(current_steps)))

    return Feature(title=title, description=' '.join(description), scenarios=scenarios)


class FeatureParser:
    """Reads feature documents from a directory"""

    def __init__(self, features_dir, extension: str = '.feature'):
        self.features_dir = Path(features_dir)
        self.extension = extension

    def discover(self) -> List[Path]:
        """List feature documents in the directory, sorted by name"""
        if not self.features_dir.is_dir():
            return []
        return sorted(path for path in self.features_dir.iterdir()
                      if path.is_file() and path.name.endswith(self.extension))

    def resolve(self, file_name: str) -> Path:
        """Path of a named document inside the features directory"""
        return self.features_dir / file_name

    def parse_file(self, file_path: Path) -> Feature:
        """Read and parse a single feature document"""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(file_path, str(e)) from e

        feature = extract(content)
        feature.file_path = str(file_path)
        logger.debug(f"Parsed {file_path}: {len(feature.scenarios)} scenario(s)")
        return feature
