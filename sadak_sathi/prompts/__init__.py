"""Centralized LLM prompts for the road-conditions assistant.

Available modules:
- assistant: system instruction grounded in live data, route-planning request
"""
