#!/usr/bin/env python3
"""Run script for calrecur."""

import logging

import uvicorn

from calrecur import config

if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "calrecur.api.app:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
    )
