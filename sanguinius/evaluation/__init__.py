from sanguinius.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
