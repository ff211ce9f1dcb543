from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from customer_service.models.schemas import Customer, CustomerCreate
from customer_service.services.customer_store import CustomerStore

router = APIRouter(prefix="/api/customers", tags=["customers"])


def get_customer_store(request: Request) -> CustomerStore:
    return request.app.state.customer_store


# Handlers are plain ``def`` so FastAPI runs each request on its threadpool.
@router.get("", response_model=dict[str, Customer])
def list_customers(store: CustomerStore = Depends(get_customer_store)) -> dict[str, Customer]:
    return store.list()


@router.get(
    "/{customer_id}",
    response_model=Customer,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Customer not found (empty body)"}},
)
def get_customer(customer_id: str, store: CustomerStore = Depends(get_customer_store)) -> Customer | Response:
    customer = store.get(customer_id)
    if customer is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return customer


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, store: CustomerStore = Depends(get_customer_store)) -> Customer:
    return store.create(payload)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_customer(customer_id: str, store: CustomerStore = Depends(get_customer_store)) -> Response:
    store.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
