"""Core services package, organized by domain.

Main Services:
- auth_service / CredentialStore: registration, login and session tokens
- AssistantService: page-aware replies for the AI chat endpoint
- ChatSession / HttpChatTransport: the chat widget's client-side lifecycle

Usage:
    from core.services import ChatSession, HttpChatTransport

    session = ChatSession(HttpChatTransport(), page_context="buyer")
    session.open()
    await session.send("Which mangoes are in season?")
"""
from core.services.auth import AuthService, CredentialStore, auth_service
from core.services.assistant import AssistantService
from core.services.chat import ChatSession, HttpChatTransport

__all__ = [
    "AuthService",
    "CredentialStore",
    "auth_service",
    "AssistantService",
    "ChatSession",
    "HttpChatTransport",
]
