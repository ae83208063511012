from fastapi import FastAPI
from wcag_analysis.config import settings
from wcag_analysis.routers import router
from wcag_analysis.logger_config import logger

app = FastAPI(title="WCAG Analysis")

# Include the router under the API prefix (/api/wcag-analysis, ...)
app.include_router(router, prefix=settings.API_PREFIX)


@app.get("/health")
def health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting App.....")
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
