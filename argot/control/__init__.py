"""
Registries, config loading, and the CommandLine facade
"""
