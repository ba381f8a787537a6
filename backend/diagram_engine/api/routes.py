from fastapi import APIRouter, HTTPException, Response

from diagram_engine.config import NOISE_SEED, RANDOM_SEED
from diagram_engine.controller import DiagramController
from diagram_engine.core.errors import InvalidParameterError
from diagram_engine.generators.registry import get_generator_registry
from diagram_engine.noise import PerlinNoise, SeededRandom
from diagram_engine.renderer import render_svg
from diagram_engine.schemas import GenerateRequest, GenerateResponse
from diagram_engine.style import StyleConfig

router = APIRouter()


def _run(request: GenerateRequest) -> DiagramController:
    noise_seed = request.noiseSeed if request.noiseSeed is not None else NOISE_SEED
    random_seed = request.randomSeed if request.randomSeed is not None else RANDOM_SEED

    try:
        controller = DiagramController(
            style=StyleConfig.from_mapping(request.style),
            noise=PerlinNoise(seed=noise_seed),
            rng=SeededRandom(random_seed),
        )
        controller.generate(request.generator, request.params)
    except InvalidParameterError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())
    return controller


@router.get("/generators")
def list_generators():
    return get_generator_registry().default_params()


@router.post("/generate", response_model=GenerateResponse)
def generate_diagram(request: GenerateRequest):
    controller = _run(request)
    return {
        "status": "success",
        "generator": request.generator,
        "params": controller.generator.params.to_dict(),
        "style": controller.style.to_dict(),
        "diagram": controller.export(),
    }


@router.post("/render/svg")
def render_diagram_svg(request: GenerateRequest):
    controller = _run(request)
    return Response(
        content=render_svg(controller.diagram, controller.style),
        media_type="image/svg+xml",
    )
