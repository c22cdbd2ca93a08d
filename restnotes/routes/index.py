"""
REST Notes — API Index
=======================

What:  GET / returns links to the top-level collections.
Why:   Clients start here and follow links instead of hard-coding paths.
"""

from fastapi import APIRouter

from restnotes.dependencies import LinkBuilderDep
from restnotes.schemas.common import IndexResource
from restnotes.services.assemblers import index_resource

router = APIRouter(tags=["Index"])


@router.get("/", response_model=IndexResource, summary="API entry point")
async def index(links: LinkBuilderDep) -> IndexResource:
    return index_resource(links)
