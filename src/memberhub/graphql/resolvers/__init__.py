"""Resolver functions for the GraphQL schema.

Every resolver opens its own store through ``info.context`` and issues a
single query; related entities are fetched by their own field resolvers.
"""
