from fastapi import FastAPI

from weconvert.config.constants import APP_TITLE, APP_VERSION
from weconvert.routers import categories, conversions, health
from weconvert.utils.log import configure_logging

configure_logging()

app = FastAPI(
    title=f"{APP_TITLE} API",
    version=APP_VERSION,
)

app.include_router(health.router)
app.include_router(categories.router)
app.include_router(conversions.router)


@app.get("/")
def root():
    return {"message": f"{APP_TITLE} API"}
