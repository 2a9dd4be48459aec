"""
Infrastructure layer: logging shared by the engine, services and CLI
"""
