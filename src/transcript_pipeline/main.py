"""FastAPI application entry point."""

import os

import uvicorn
from ddtrace import patch_all

from transcript_pipeline.app import create_app
from transcript_pipeline.server import PipelineServer

patch_all()

app = create_app()


def main():
    """Runs the API server."""
    config = uvicorn.Config(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")), log_config=None)
    PipelineServer(config, app.state.registry).run()


if __name__ == "__main__":
    main()
