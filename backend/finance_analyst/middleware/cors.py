from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finance_analyst.core.config import settings


def setup_cors(app: FastAPI) -> None:
    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed requests against a wildcard origin.
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
