from fastapi import FastAPI

from finance_analyst.agents.finance.router import router as finance_router
from finance_analyst.core.logging import setup_logging
from finance_analyst.middleware.cors import setup_cors

setup_logging()


app = FastAPI(title="Financial Data Analyst API")

setup_cors(app)

app.include_router(finance_router)
