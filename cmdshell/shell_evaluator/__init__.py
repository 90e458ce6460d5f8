"""Evaluator that resolves interpolations through a run callback."""

from .shell_evaluator import RunCallback, ShellEvaluator, execute

__all__ = ["RunCallback", "ShellEvaluator", "execute"]
