from fastapi import FastAPI

from fmtdiff.api.routes import router
from fmtdiff.shared.logging import setup_logging
from fmtdiff.middleware.request_context import RequestContextMiddleware
from fmtdiff.exceptions.handlers import register_exception_handlers


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(title="fmtdiff", version="0.1.0")
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
