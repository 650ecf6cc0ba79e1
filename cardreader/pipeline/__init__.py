"""Pipeline module for orchestrating the full card processing flow."""

from .card_pipeline import CardPipeline, CardProcessor, CardProcessResult, process

__all__ = ['CardPipeline', 'CardProcessor', 'CardProcessResult', 'process']
