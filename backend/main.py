"""FastAPI application entry point."""

from infrastructure.config import get_settings
from presentation.app import create_app


settings = get_settings()
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
