"""FastAPI application setup and GraphQL mounting for the weather activities API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from .config import settings
from .schema import schema

API_TITLE = "Travel Planning GraphQL API"
API_VERSION = "1.0.0"
GRAPHQL_PATH = "/graphql"

app = FastAPI(title=API_TITLE, version=API_VERSION)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

graphql_app = GraphQLRouter(
    schema,
    graphql_ide="graphiql" if settings.graphql_introspection else None,
)


@app.get("/")
def service_info():
    """Describe the service and where its GraphQL endpoint lives."""
    return {
        "message": API_TITLE,
        "version": API_VERSION,
        "endpoints": {"graphql": GRAPHQL_PATH},
    }


app.include_router(graphql_app, prefix=GRAPHQL_PATH)
