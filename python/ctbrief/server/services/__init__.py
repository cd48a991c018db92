from ctbrief.server.services.brief_service import BriefService

__all__ = ["BriefService"]
