"""Main generation orchestrator"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from bddgen.core.config_manager import GeneratorConfig
from bddgen.generator.script_generator import ScriptGenerator
from bddgen.parser.feature_parser import FeatureParser
from bddgen.utils.errors import DocumentReadError
from bddgen.utils.logger import setup_logger

logger = setup_logger(__name__)

GENERATED = 'generated'
SKIPPED = 'skipped'
FAILED = 'failed'


@dataclass
class DocumentResult:
    """Outcome of processing one feature document"""
    source: Path
    status: str
    output: Optional[Path] = None
    scenarios: int = 0
    error: Optional[str] = None


@dataclass
class GenerationReport:
    results: List[DocumentResult] = field(default_factory=list)

    def _with_status(self, status: str) -> List[DocumentResult]:
        return [r for r in self.results if r.status == status]

    @property
    def generated(self) -> List[DocumentResult]:
        return self._with_status(GENERATED)

    @property
    def skipped(self) -> List[DocumentResult]:
        return self._with_status(SKIPPED)

    @property
    def failed(self) -> List[DocumentResult]:
        return self._with_status(FAILED)

    @property
    def processed(self) -> int:
        return len(self.results)


class GenerationExecutor:
    """Orchestrates feature-to-test generation for a directory of documents"""

    def __init__(self, config: GeneratorConfig, generator: Optional[ScriptGenerator] = None):
        self.config = config
        self.parser = FeatureParser(config.features_dir, config.feature_extension)
        self.generator = generator or ScriptGenerator(config.target)

    def collect(self, file_selector: Optional[str] = None) -> List[Path]:
        """Documents to process: one named file, or every feature document"""
        if file_selector:
            return [self.parser.resolve(file_selector)]

        features_dir = self.config.features_dir
        if not features_dir.exists():
            logger.info(f"Creating features directory: {features_dir}")
            features_dir.mkdir(parents=True, exist_ok=True)
            return []

        return self.parser.discover()

    def run(self, file_selector: Optional[str] = None) -> GenerationReport:
        """Generate a test module for each selected document"""
        report = GenerationReport()
        self.config.output_dir.mkdir(parents=True, exist_ok=True)
        files = self.collect(file_selector)

        if not files:
            logger.warning(f"No {self.config.feature_extension} files found in {self.config.features_dir}")
            logger.info(f"Create a feature file first, e.g. {self.config.features_dir / ('example' + self.config.feature_extension)}")
            return report

        logger.info(f"Processing {len(files)} feature file(s)...")

        for file_path in files:
            report.results.append(self.process_document(file_path))

        self._log_summary(report)
        return report

    def process_document(self, file_path: Path) -> DocumentResult:
        """Parse, gate and emit a single document; read failures are contained"""
        try:
            feature = self.parser.parse_file(file_path)
        except DocumentReadError as e:
            logger.error(f"Error processing {file_path.name}: {e.reason}")
            return DocumentResult(source=file_path, status=FAILED, error=e.reason)

        if not feature.is_valid():
            logger.warning(f"No valid scenarios in {file_path.name}")
            return DocumentResult(source=file_path, status=SKIPPED)

        output_path = self.config.output_dir / self.generator.output_name(
            file_path, self.config.feature_extension)
        content = self.generator.emit(feature)

        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)

        logger.info(f"{file_path.name} -> {output_path.name} ({len(feature.scenarios)} scenario(s))")
        return DocumentResult(source=file_path, status=GENERATED, output=output_path,
                              scenarios=len(feature.scenarios))

    def _log_summary(self, report: GenerationReport) -> None:
        logger.info(f"Generated: {len(report.generated)}, skipped: {len(report.skipped)}, "
                    f"failed: {len(report.failed)}")
        if report.generated:
            logger.info(f"To run the generated tests: {self.generator.target.run_hint}")
