"""FastAPI application."""

from fastapi import FastAPI

from server.routers import router

app = FastAPI(title="doxtree", description="Render Doxygen class hierarchies as collapsible trees.")
app.include_router(router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "healthy"}
