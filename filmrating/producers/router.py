from typing import List

from fastapi import APIRouter, Depends, Query, Response
from pymongo.database import Database

from filmrating.database import get_db
from filmrating.producers import service
from filmrating.producers.schemas import (
    PRODUCER_CREATE_SCHEMA,
    PRODUCER_UPDATE_SCHEMA,
    ProducerCreate,
    ProducerInfo,
    ProducerOut,
    ProducerUpdate,
)
from filmrating.schemas import MAX_SKIP, CreatedOut
from filmrating.validation import validated_body

router = APIRouter(prefix="/api/producers", tags=["Producers"])


@router.post("", status_code=201, response_model=CreatedOut)
def create_producer(
    dto: ProducerCreate = Depends(validated_body(PRODUCER_CREATE_SCHEMA, ProducerCreate)),
    db: Database = Depends(get_db),
):
    return {"id": service.create(db, dto)}


@router.get("", response_model=List[ProducerOut])
def list_producers(
    skip: int = Query(0, ge=0, le=MAX_SKIP),
    limit: int = Query(10, ge=1, le=100),
    db: Database = Depends(get_db),
):
    return service.get_all(db, skip, limit)


@router.get("/{producer_id}", response_model=ProducerOut)
def get_producer(producer_id: str, db: Database = Depends(get_db)):
    return service.get_by_id(db, producer_id)


@router.get("/{producer_id}/info", response_model=ProducerInfo)
def get_producer_info(producer_id: str, db: Database = Depends(get_db)):
    return service.get_info(db, producer_id)


@router.patch("/{producer_id}")
def update_producer(
    producer_id: str,
    dto: ProducerUpdate = Depends(validated_body(PRODUCER_UPDATE_SCHEMA, ProducerUpdate)),
    db: Database = Depends(get_db),
):
    service.update(db, producer_id, dto)
    return Response(status_code=200)


@router.delete("/{producer_id}", status_code=204)
def delete_producer(producer_id: str, db: Database = Depends(get_db)):
    service.remove(db, producer_id)
    return Response(status_code=204)
