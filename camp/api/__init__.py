"""HTTP API: one router module per resource, assembled in `camp.api.main`."""
