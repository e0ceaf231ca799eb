"""Prompt-to-script generator with the error boundary around the pipeline."""

import logging
from typing import Any, Optional, Tuple

from core.prompt_parser import StyleClassification, StyleClassifier

from .config import GeneratorConfig
from .script_builder import ObjectLimitError
from .templates import render_template
from .types import BuildingSpec, GeneratedScript

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Base exception for generation errors."""

    def __init__(self, message: str, error_type: str = "unknown"):
        super().__init__(message)
        self.message = message
        self.error_type = error_type

    def to_dict(self) -> dict:
        """Convert to dictionary for error responses."""
        return {"error": self.message, "error_type": self.error_type}


class MissingPromptError(GenerationError):
    """Prompt absent or empty."""

    def __init__(self, message: str = "Prompt is required"):
        super().__init__(message, error_type="missing_prompt")


class PromptLimitError(GenerationError):
    """Extracted dimensions above the configured limits."""

    def __init__(self, message: str):
        super().__init__(message, error_type="limit_exceeded")


class GenerationFailure(GenerationError):
    """Unexpected failure while generating; the cause is only logged."""

    def __init__(self, message: str = "Failed to generate code"):
        super().__init__(message, error_type="generation_failure")


class BuildingGenerator:
    """
    Turns a building description into a Blender Python script.

    Pipeline:
    1. Extract floors, width and depth from the prompt
    2. Classify the style by fixed keyword precedence
    3. Run the one template registered for that style

    Every call is independent; the generator holds only read-only config.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.classifier = StyleClassifier()

    def analyze(self, prompt: Any) -> Tuple[BuildingSpec, StyleClassification]:
        """
        Build the spec and style classification for a prompt.

        The prompt is classified once and the spec takes its style from
        that classification.

        Args:
            prompt: Natural-language description

        Returns:
            Tuple of (BuildingSpec, StyleClassification)

        Raises:
            MissingPromptError: If the prompt is absent or empty
            PromptLimitError: If extracted values exceed the limits
            GenerationFailure: On any unexpected error
        """
        self._require_prompt(prompt)
        try:
            classification = self.classifier.classify(prompt)
            spec = BuildingSpec.from_prompt(prompt, self.config, style=classification.style)
        except Exception as e:
            logger.exception(f"Failed to parse prompt: {e}")
            raise GenerationFailure() from e

        if self.config.exceeds_limits(spec.floors, spec.width, spec.depth):
            raise PromptLimitError(
                f"Building too large: limits are {self.config.max_floors} floors "
                f"and {self.config.max_dimension}m per side"
            )
        return spec, classification

    def parse(self, prompt: Any) -> BuildingSpec:
        """Build the spec for a prompt without generating the script."""
        return self.analyze(prompt)[0]

    def generate(self, prompt: Any) -> GeneratedScript:
        """
        Generate the Blender script for a prompt.

        Args:
            prompt: Natural-language description

        Returns:
            GeneratedScript with the spec and the full script text
        """
        spec, classification = self.analyze(prompt)

        try:
            code = render_template(spec)
        except ObjectLimitError as e:
            raise PromptLimitError(f"Building too detailed: {e}") from e
        except Exception as e:
            logger.exception(f"Failed to generate code: {e}")
            raise GenerationFailure() from e

        logger.info(
            f"Generated {spec.style.value} building: {spec.floors} floors, "
            f"{spec.width}x{spec.depth}m ({len(code)} chars)"
        )
        logger.debug(f"Style decision: {classification.reasoning}")

        return GeneratedScript(
            spec=spec,
            code=code,
            matched_styles=classification.matched_styles,
        )

    @staticmethod
    def _require_prompt(prompt: Any) -> None:
        if isinstance(prompt, str):
            prompt = prompt.strip()
        if not prompt:
            raise MissingPromptError()


def generate_building_script(prompt: str, config: Optional[GeneratorConfig] = None) -> str:
    """Generate only the script text for a prompt."""
    return BuildingGenerator(config).generate(prompt).code
