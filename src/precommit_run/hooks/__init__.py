"""Orchestration of pre-commit hook runs."""

from ._orchestrator import HookExecution, HookOrchestrator, ResolvedFiles, RunReport

__all__ = ["HookExecution", "HookOrchestrator", "ResolvedFiles", "RunReport"]
