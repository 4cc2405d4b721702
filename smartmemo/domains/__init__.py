"""Domain layer (one thin wrapper per remote service area).

Domain modules should not depend on UI. Transport is passed in as an ApiClient.
"""
