import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _optional_int(name: str):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


CANVAS_WIDTH = int(os.getenv("DIAGRAM_CANVAS_WIDTH", "1200"))
CANVAS_HEIGHT = int(os.getenv("DIAGRAM_CANVAS_HEIGHT", "800"))
BACKGROUND_COLOR = os.getenv("DIAGRAM_BACKGROUND", "#0a0a0a")

DEFAULT_GENERATOR = os.getenv("DIAGRAM_DEFAULT_GENERATOR", "radial")

NOISE_SEED = int(os.getenv("DIAGRAM_NOISE_SEED", "0"))
RANDOM_SEED = _optional_int("DIAGRAM_RANDOM_SEED")  # None -> fresh entropy

LOG_LEVEL = os.getenv("DIAGRAM_LOG_LEVEL", "INFO")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("DIAGRAM_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
