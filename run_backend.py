#!/usr/bin/env python3
"""Start the Wall Stud Framer API server."""

import logging

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "studframe.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["studframe"],
    )
