"""
Controllers Package

HTTP blueprints of the game server.
"""
