"""Serverless functions: a greeter template, a div-scoped link finder and a
section text search, all speaking the JSON-in / JSON-out platform convention."""
