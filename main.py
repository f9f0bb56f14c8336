"""Main entry point for News Verifier.

This file serves the HTTP API with uvicorn.
For CLI usage, use: newsverifier <text>
Or run directly: python -m newsverifier.interfaces.cli.cli <text>
"""

import uvicorn

from newsverifier.config.settings import get_settings

if __name__ == "__main__":
    uvicorn.run(
        "newsverifier.interfaces.api.app:app",
        host="0.0.0.0",
        port=get_settings().port,
    )
