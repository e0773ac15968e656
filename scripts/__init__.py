"""scripts package initializer so the CLI can be run with
`python -m scripts.search_twitter`.
"""
