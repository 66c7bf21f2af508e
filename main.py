from contextlib import asynccontextmanager

from fastapi import FastAPI
from mcp.server.fastmcp import FastMCP

from storefront.config import BASE_URL
from storefront.context import AppContext, build_context
from storefront.logging_config import configure_logging, get_logger
from storefront.mcp_handlers import register_mcp
from storefront.routes import register_api_routes

logger = get_logger("main")


def create_app(context: AppContext | None = None) -> FastAPI:
    ctx = context or build_context()

    # =====================================================
    # 1) Lifespan: component'leri sırayla başlat / durdur
    # =====================================================
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await ctx.registry.start_all()
        logger.info("application_started", components=ctx.registry.status())
        try:
            yield
        finally:
            await ctx.registry.stop_all()

    app = FastAPI(lifespan=lifespan)
    app.state.context = ctx

    # =====================================================
    # 2) MCP Server
    # =====================================================
    mcp = FastMCP(
        name="storefront-mcp",
        sse_path="/sse",
        message_path="/messages/",
    )
    register_mcp(mcp, ctx)

    @app.get("/mcp")
    async def mcp_info_handler():
        """MCP server info"""
        return {
            "name": "storefront-mcp",
            "version": "1.0.0",
            "protocols": ["sse"],
            "endpoints": {
                "sse": f"{BASE_URL}/mcp/sse",
                "messages": f"{BASE_URL}/mcp/messages/",
            },
        }

    # =====================================================
    # 3) Normal API routes
    # =====================================================
    register_api_routes(app, ctx)

    # =====================================================
    # 4) Debug routes
    # =====================================================
    @app.get("/__routes__")
    async def debug_routes():
        return [{"path": route.path, "methods": list(route.methods) if hasattr(route, "methods") else None} for route in app.router.routes]

    @app.get("/__components__")
    async def debug_components():
        return ctx.registry.status()

    app.mount("/mcp", mcp.sse_app())
    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn, os
    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
