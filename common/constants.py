import logging
import os
from dotenv import load_dotenv

# Values from a local `.env` never override the real environment.
load_dotenv(override=False)

BASE_URL      = os.getenv("FPL_BASE_URL", "https://fantasy.premierleague.com/api")
HTTP_TIMEOUT  = (
    float(os.getenv("FPL_CONNECT_TIMEOUT", "10")),
    float(os.getenv("FPL_READ_TIMEOUT", "20")),
)
USER_AGENT    = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/135.0.0.0 Safari/537.36"
)
LOG_LEVEL     = os.getenv("LOG_LEVEL", "INFO")

GAMEWEEKS     = list(range(1, 39))
BADGE_BASE    = "https://resources.premierleague.com/premierleague/badges/70"
HEATMAP_COLORSCALE = os.getenv("HEATMAP_COLORSCALE", "Reds")

METRICS       = ["overall", "attack", "defence"]
MODES         = ["absolute", "difference"]
DEFAULT_METRIC = "overall"
DEFAULT_MODE   = "absolute"

LOG_FORMAT     = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def configure_logging(level: str = LOG_LEVEL) -> None:
    # Either page can start a session, so both call this.
    logging.basicConfig(level=level, format=LOG_FORMAT)
