"""Pipeline services: grid indexing, row normalization, dates, output, batch driver."""
