"""
Entry point for the highlighter API
"""
import uvicorn
from highlighter.core.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "highlighter.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info"
    )
