"""Application services layer (event fan-out, command surface).

Services coordinate the domain clients for the host UI. They should avoid UI concerns
beyond the small protocols they accept.
"""
