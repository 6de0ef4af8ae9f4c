"""GraphQL schema, resolvers and HTTP route."""
