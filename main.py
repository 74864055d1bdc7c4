"""
Hello World Service runner.

Logging is configured when uvicorn imports hello_world.main.
"""
import uvicorn

from hello_world.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "hello_world.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG_MODE
    )
