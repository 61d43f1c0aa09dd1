"""Well-known schema builders and string helpers for OpenAPI v3 documents."""