#!/usr/bin/env python3
"""Start the Floorplan Editor API server."""

import logging
import os

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    )
    uvicorn.run(
        "floorplan.api.main:app",
        host=os.environ.get("FLOORPLAN_HOST", "0.0.0.0"),
        port=int(os.environ.get("FLOORPLAN_PORT", "8000")),
        reload=True,
        reload_dirs=["floorplan"],
    )
