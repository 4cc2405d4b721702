"""Infrastructure layer (IO and integrations).

Code here talks to the outside world. Domain modules receive it as injected clients.
"""
