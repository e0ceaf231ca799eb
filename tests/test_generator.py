"""Tests for BuildingGenerator and its error boundary."""

import dataclasses
import logging
import time

import pytest

from core.building_gen import (
    BuildingGenerator,
    BuildingSpec,
    GeneratedScript,
    GenerationError,
    GenerationFailure,
    GeneratorConfig,
    MissingPromptError,
    PromptLimitError,
    generate_building_script,
)
from core.prompt_parser import BuildingStyle


@pytest.fixture
def generator():
    """Create a generator with default config."""
    return BuildingGenerator()


class TestBuildingSpec:
    """Tests for BuildingSpec."""

    @pytest.mark.parametrize("prompt", [
        "a modern building",
        "Build a Gothic cathedral with tall spires",
        "a castle",
        "something tall and wide",
        "",
    ])
    def test_defaults_without_digits(self, prompt):
        spec = BuildingSpec.from_prompt(prompt)

        assert spec.floors == 5
        assert spec.width == 10
        assert spec.depth == 10
        assert spec.floor_height == 3

    def test_extracted_values(self):
        spec = BuildingSpec.from_prompt("a 12 floor building 30 wide and 20 deep")

        assert spec.floors == 12
        assert spec.width == 30
        assert spec.depth == 20
        assert spec.style == BuildingStyle.STANDARD
        assert spec.total_height == 36

    def test_zero_falls_back_to_default(self):
        spec = BuildingSpec.from_prompt("a 0 floor building 0 wide")

        assert spec.floors == 5
        assert spec.width == 10

    def test_floor_height_not_from_text(self):
        spec = BuildingSpec.from_prompt("floor height 7")
        assert spec.floor_height == 3

    def test_immutable(self):
        spec = BuildingSpec.from_prompt("a modern tower")
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.floors = 10

    def test_config_defaults(self):
        config = GeneratorConfig(default_floors=8, default_width=20, default_depth=15)
        spec = BuildingSpec.from_prompt("an office", config)

        assert (spec.floors, spec.width, spec.depth) == (8, 20, 15)

    def test_to_dict(self):
        data = BuildingSpec.from_prompt("a modern 4 floor tower").to_dict()

        assert data["style"] == "castle"
        assert data["floors"] == 4
        assert data["total_height"] == 12


class TestGenerate:
    """Tests for BuildingGenerator.generate."""

    def test_modern_scenario(self, generator):
        result = generator.generate("Create a modern 5-story apartment building")

        assert isinstance(result, GeneratedScript)
        assert result.spec.style == BuildingStyle.MODERN
        assert (result.spec.floors, result.spec.width, result.spec.depth) == (5, 10, 10)
        assert "twist.deform_method = 'TWIST'" in result.code
        for floor in range(1, 5):
            assert f'obj.name = "Balcony_F{floor}"' in result.code
        assert "Balcony_F0" not in result.code
        assert "Balcony_F5" not in result.code

    def test_gothic_scenario(self, generator):
        result = generator.generate("Build a Gothic cathedral with tall spires")

        assert result.spec.style == BuildingStyle.GOTHIC
        assert "\ndepth = 20\n" in result.code
        assert "\nheight = 15\n" in result.code
        assert result.code.count("bpy.ops.mesh.primitive_cone_add(") == 2
        assert result.code.count('obj.name = "Spire_Cap_') == 2

    def test_castle_beats_modern(self, generator):
        result = generator.generate("a modern castle")

        assert result.spec.style == BuildingStyle.CASTLE
        assert result.matched_styles == [BuildingStyle.CASTLE, BuildingStyle.MODERN]
        assert "Castle_Walls" in result.code

    def test_deterministic(self, generator):
        prompt = "a 7 floor glass tower 14 wide"
        assert generator.generate(prompt).code == generator.generate(prompt).code
        assert generator.generate(prompt).code == BuildingGenerator().generate(prompt).code

    def test_to_dict(self, generator):
        data = generator.generate("a 3 floor office").to_dict()

        assert data["code"].startswith("import bpy")
        assert data["building"]["floors"] == 3
        assert data["building"]["style"] == "standard"
        assert data["matched_styles"] == []

    def test_filename(self, generator):
        assert generator.generate("a house").filename == "blender_building.py"

    def test_generate_building_script(self):
        script = generate_building_script("a cottage")
        assert script.startswith("import bpy")
        assert 'obj.name = "Cottage_Main"' in script

    def test_logs_generation(self, generator, caplog):
        with caplog.at_level(logging.INFO, logger="core.building_gen.generator"):
            generator.generate("a gothic church")
        assert "gothic" in caplog.text

    def test_prompt_classified_once(self, generator, monkeypatch):
        calls = []
        classify = generator.classifier.classify
        monkeypatch.setattr(
            generator.classifier, "classify",
            lambda text: calls.append(text) or classify(text),
        )

        def unexpected(text):
            raise AssertionError("style classified twice")

        monkeypatch.setattr("core.building_gen.types.classify_style", unexpected)

        result = generator.generate("a modern castle")

        assert calls == ["a modern castle"]
        assert result.spec.style == BuildingStyle.CASTLE
        assert result.matched_styles == [BuildingStyle.CASTLE, BuildingStyle.MODERN]

    def test_analyze_returns_matching_classification(self, generator):
        spec, classification = generator.analyze("a small glass house")

        assert spec.style == classification.style == BuildingStyle.COTTAGE
        assert classification.is_ambiguous


class TestMissingPrompt:
    """Tests for prompt validation."""

    @pytest.mark.parametrize("prompt", [None, "", "   ", "\n\t", 0, False, [], {}])
    def test_missing_prompt(self, generator, prompt):
        with pytest.raises(MissingPromptError) as exc_info:
            generator.generate(prompt)

        assert exc_info.value.error_type == "missing_prompt"
        assert exc_info.value.message == "Prompt is required"

    def test_missing_prompt_skips_generation(self, generator, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "core.building_gen.generator.render_template",
            lambda spec: calls.append(spec) or "",
        )
        with pytest.raises(MissingPromptError):
            generator.generate("")
        assert calls == []


class TestGenerationFailure:
    """Tests for the unexpected-failure path."""

    @pytest.mark.parametrize("prompt", [123, ["a", "house"], {"prompt": "x"}])
    def test_malformed_prompt(self, generator, prompt):
        with pytest.raises(GenerationFailure) as exc_info:
            generator.generate(prompt)

        assert exc_info.value.error_type == "generation_failure"
        assert str(exc_info.value) == "Failed to generate code"

    def test_template_error_is_wrapped(self, generator, monkeypatch):
        def broken(spec):
            raise RuntimeError("boom")

        monkeypatch.setattr("core.building_gen.generator.render_template", broken)

        with pytest.raises(GenerationFailure) as exc_info:
            generator.generate("a modern tower")

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "boom" not in exc_info.value.message

    def test_cause_is_logged(self, generator, monkeypatch, caplog):
        def broken(spec):
            raise RuntimeError("template exploded")

        monkeypatch.setattr("core.building_gen.generator.render_template", broken)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(GenerationFailure):
                generator.generate("a modern tower")

        assert "template exploded" in caplog.text

    def test_error_to_dict(self):
        assert GenerationFailure().to_dict() == {
            "error": "Failed to generate code",
            "error_type": "generation_failure",
        }

    def test_hierarchy(self):
        for cls in (MissingPromptError, PromptLimitError, GenerationFailure):
            assert issubclass(cls, GenerationError)


class TestLimits:
    """Tests for configured size limits."""

    def test_too_many_floors(self, generator):
        with pytest.raises(PromptLimitError) as exc_info:
            generator.generate("a 500 floor tower")
        assert exc_info.value.error_type == "limit_exceeded"

    def test_too_wide(self, generator):
        with pytest.raises(PromptLimitError):
            generator.generate("a block 5000 wide")

    def test_at_limit_allowed(self):
        generator = BuildingGenerator(GeneratorConfig(max_floors=10))
        assert generator.parse("a 10 floor block").floors == 10
        with pytest.raises(PromptLimitError):
            generator.parse("an 11 floor block")

    @pytest.mark.parametrize("prompt", [
        "200 floors 1000 wide 1000 deep",
        "a 200 floor office 1000 wide",
    ])
    def test_too_many_windows_fails_fast(self, generator, prompt):
        start = time.perf_counter()
        with pytest.raises(PromptLimitError) as exc_info:
            generator.generate(prompt)
        elapsed = time.perf_counter() - start

        assert "too detailed" in exc_info.value.message
        assert elapsed < 1.0

    def test_large_building_is_fast(self, generator):
        start = time.perf_counter()
        result = generator.generate("a 10 floor office 480 wide")
        elapsed = time.perf_counter() - start

        # 10 floors of 486 windows plus body, entrance and roof
        assert result.code.count("obj = bpy.context.active_object") == 4863
        assert elapsed < 1.0

    @pytest.mark.parametrize("prompt", [
        "a 200 floor gothic church 1000 wide 1000 deep",
        "a modern 200 floor building 1000 wide 1000 deep",
        "a castle 1000 wide 1000 deep",
        "a cottage 1000 wide 1000 deep",
        "a factory 1000 wide 1000 deep",
    ])
    def test_other_styles_at_max_sizes(self, generator, prompt):
        start = time.perf_counter()
        result = generator.generate(prompt)
        elapsed = time.perf_counter() - start

        assert result.code.startswith("import bpy")
        assert elapsed < 1.0


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_defaults(self):
        config = GeneratorConfig()

        assert config.default_floors == 5
        assert config.default_width == 10
        assert config.default_depth == 10
        assert config.floor_height == 3

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BUILDING_DEFAULT_FLOORS", "7")
        monkeypatch.setenv("BUILDING_MAX_FLOORS", "50")

        config = GeneratorConfig.from_env()

        assert config.default_floors == 7
        assert config.max_floors == 50
        assert config.floor_height == 3.0

    def test_from_env_used_by_generator(self, monkeypatch):
        monkeypatch.setenv("BUILDING_DEFAULT_FLOORS", "7")

        result = BuildingGenerator(GeneratorConfig.from_env()).generate("an office block")

        assert result.spec.floors == 7
        assert "\nfloors = 7\n" in result.code
        assert "\ntotal_height = 21\n" in result.code
