from fastapi import FastAPI
from trace_puzzle.routers import puzzle_routers
from trace_puzzle.core.config import settings
from trace_puzzle.utils.logger_config import configure_logging

# configure logging before anything logs
configure_logging()

# create FastAPI
app = FastAPI(title="Trace Puzzle Generator API", version="1.0")

# get routers
app.include_router(puzzle_routers.router, prefix="/puzzles", tags=["Puzzles"])


# Landing page
@app.get("/")
async def index():
    return {
        "name": app.title,
        "version": app.version,
        "grid_size": {
            "min": settings.MIN_GRID_SIZE,
            "max": settings.MAX_GRID_SIZE,
            "default": settings.DEFAULT_GRID_SIZE,
        },
    }
