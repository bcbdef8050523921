"""HTTP routers, schemas and FastAPI wiring."""
