"""
Adapters for turning raw AI engine output into signals
"""
