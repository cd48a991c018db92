from ctbrief.server.api.routers.brief import create_brief_router

__all__ = ["create_brief_router"]
