"""Building script generation routes."""

import logging
from typing import Any, NoReturn

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel

from core.building_gen import (
    BuildingGenerator,
    GenerationError,
    GenerationFailure,
    GeneratorConfig,
    MissingPromptError,
    PromptLimitError,
)
from core.prompt_parser import STYLE_KEYWORDS, STYLE_PRECEDENCE, BuildingStyle

logger = logging.getLogger(__name__)

router = APIRouter()

generator = BuildingGenerator(GeneratorConfig.from_env())

EXAMPLE_PROMPTS = [
    "Create a modern 5-story apartment building with balconies",
    "Build a Gothic cathedral with tall spires and stained glass windows",
    "Generate a futuristic skyscraper with a twisting design",
    "Make a small cottage with a chimney and windows",
    "Create an industrial building with large garage doors",
    "Build a castle with towers and battlements",
]

STYLE_DESCRIPTIONS = {
    BuildingStyle.STANDARD: "Box building with windows on every floor and a flat roof",
    BuildingStyle.MODERN: "Twisted glass tower with balconies",
    BuildingStyle.GOTHIC: "Cathedral with spires, arch windows, rose window and buttresses",
    BuildingStyle.CASTLE: "Hollow curtain wall with corner towers and battlements",
    BuildingStyle.COTTAGE: "Small cottage with pitched roof, chimney and porch",
    BuildingStyle.WAREHOUSE: "Long industrial shed with loading docks",
}

ERROR_STATUS = {
    MissingPromptError: 400,
    PromptLimitError: 422,
    GenerationFailure: 500,
}


class GenerateRequest(BaseModel):
    """Generation request."""

    # Left untyped so malformed prompts reach the generator's error boundary
    prompt: Any = None


class GenerateResponse(BaseModel):
    """Generated script with the parameters it was built from."""

    code: str
    building: dict
    matched_styles: list[str]


def _raise_http(error: GenerationError) -> NoReturn:
    status_code = ERROR_STATUS.get(type(error), 500)
    logger.warning(f"Generation rejected ({error.error_type}): {error.message}")
    raise HTTPException(status_code=status_code, detail=error.to_dict())


@router.post("/", response_model=GenerateResponse)
def generate_script(request: GenerateRequest):
    """Generate a Blender Python script from a building description."""
    try:
        result = generator.generate(request.prompt)
    except GenerationError as e:
        _raise_http(e)

    return result.to_dict()


@router.post("/parse")
def parse_prompt(request: GenerateRequest):
    """Show the parameters and style a prompt resolves to."""
    try:
        spec, classification = generator.analyze(request.prompt)
    except GenerationError as e:
        _raise_http(e)

    return {
        "building": spec.to_dict(),
        "classification": classification.to_dict(),
    }


@router.post("/download")
def download_script(request: GenerateRequest):
    """Generate the script and return it as a downloadable file."""
    try:
        result = generator.generate(request.prompt)
    except GenerationError as e:
        _raise_http(e)

    return Response(
        content=result.code,
        media_type="text/x-python",
        headers={"Content-Disposition": f"attachment; filename={result.filename}"},
    )


@router.get("/styles")
async def get_styles():
    """Get available building styles in precedence order."""
    ordered = list(STYLE_PRECEDENCE) + [BuildingStyle.STANDARD]
    return {
        "styles": [
            {
                "id": style.value,
                "name": style.name.title(),
                "description": STYLE_DESCRIPTIONS[style],
                "keywords": list(STYLE_KEYWORDS.get(style, ())),
                "precedence": rank,
            }
            for rank, style in enumerate(ordered, start=1)
        ]
    }


@router.get("/examples")
async def get_examples():
    """Get example prompts."""
    return {"examples": EXAMPLE_PROMPTS}
