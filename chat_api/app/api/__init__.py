"""
Plain HTTP routes served next to the GraphQL endpoint.

Only small operational endpoints live here; all chat data is exposed
through ``chat_api.app.graphql``.
"""
