from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from apis import menu, roles
from settings import ENVIRONMENT

app = FastAPI(
    title="Menu Admin API",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

# CORS middleware for development
if ENVIRONMENT == "development":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

app.include_router(menu.router, prefix="/api")
app.include_router(roles.router, prefix="/api")


@app.get("/api/health")
async def root():
    """API health check."""
    return {"message": "Menu Admin API is running"}
