from contextlib import asynccontextmanager
from typing import Any
from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from flipside import paths
from flipside.actions.auth import authenticate, sign_up
from flipside.actions.invoice import create_invoice, delete_invoice, update_invoice
from flipside.actions.label import create_label, delete_label, update_label
from flipside.actions.order import delete_order, update_order
from flipside.actions.purchase import delete_purchase, update_purchase
from flipside.agents.auth import AuthAgent
from flipside.agents.postgres import PostgresAgent, default_agent
from flipside.cache import view_cache
from flipside.config import settings
from flipside.logger import configure_logging
from flipside.schemas.state import FormState
from flipside.upload.order import upload_orders
from flipside.upload.purchase import upload_purchases
from flipside.upload.refund import upload_refunds

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    app.state.agent = default_agent()
    yield
    await app.state.agent.dispose()

app = FastAPI(lifespan=lifespan)
app.add_middleware(SessionMiddleware, secret_key=settings.SESSION_SECRET)

def get_agent(request: Request) -> PostgresAgent:
    return request.app.state.agent

def get_auth(agent: PostgresAgent = Depends(get_agent)) -> AuthAgent:
    return AuthAgent(agent)

def respond(state: FormState):
    if state.redirect:
        return RedirectResponse(state.redirect, status_code=303)
    return state.model_dump(exclude_none=True)

def require_user(request: Request) -> str:
    user = request.session.get("user")
    if not user:
        raise HTTPException(status_code=303, headers={"Location": paths.LOGIN})
    return user

router = APIRouter(dependencies=[Depends(require_user)])

# listings

@router.get(paths.INVOICES)
async def list_invoices(agent: PostgresAgent = Depends(get_agent)):
    return await view_cache.get_or_load(paths.INVOICES, agent.list_invoices)

@router.get(paths.SALES)
async def list_orders(agent: PostgresAgent = Depends(get_agent)):
    return await view_cache.get_or_load(paths.SALES, agent.list_orders)

@router.get(paths.PURCHASES)
async def list_purchases(agent: PostgresAgent = Depends(get_agent)):
    return await view_cache.get_or_load(paths.PURCHASES, agent.list_purchases)

@router.get(paths.REFUNDS)
async def list_refunds(agent: PostgresAgent = Depends(get_agent)):
    return await view_cache.get_or_load(paths.REFUNDS, agent.list_refunds)

@router.get("/dashboard/sales/{order_number}/labels")
async def list_labels(order_number: str, agent: PostgresAgent = Depends(get_agent)):
    return await view_cache.get_or_load(paths.labels(order_number), lambda: agent.list_labels(order_number))

# invoices

@router.post("/dashboard/invoices/create")
async def post_create_invoice(request: Request, agent: PostgresAgent = Depends(get_agent)):
    return respond(await create_invoice(None, await request.form(), agent))

@router.post("/dashboard/invoices/{invoice_id}/edit")
async def post_update_invoice(invoice_id: str, request: Request, agent: PostgresAgent = Depends(get_agent)):
    return respond(await update_invoice(invoice_id, None, await request.form(), agent))

@router.post("/dashboard/invoices/{invoice_id}/delete")
async def post_delete_invoice(invoice_id: str, agent: PostgresAgent = Depends(get_agent)):
    return respond(await delete_invoice(invoice_id, agent))

# orders

@router.post("/dashboard/sales/upload")
async def post_upload_orders(rows: list[dict[str, Any]] = Body(...), agent: PostgresAgent = Depends(get_agent)):
    return respond(await upload_orders(rows, agent))

@router.post("/dashboard/sales/{order_number}/edit")
async def post_update_order(order_number: str, request: Request, agent: PostgresAgent = Depends(get_agent)):
    return respond(await update_order(order_number, None, await request.form(), agent))

@router.post("/dashboard/sales/{order_number}/delete")
async def post_delete_order(order_number: str, agent: PostgresAgent = Depends(get_agent)):
    return respond(await delete_order(order_number, agent))

# purchases

@router.post("/dashboard/purchases/upload")
async def post_upload_purchases(rows: list[dict[str, Any]] = Body(...), agent: PostgresAgent = Depends(get_agent)):
    return respond(await upload_purchases(rows, agent))

@router.post("/dashboard/purchases/{item_id}/edit")
async def post_update_purchase(item_id: str, request: Request, agent: PostgresAgent = Depends(get_agent)):
    return respond(await update_purchase(item_id, None, await request.form(), agent))

@router.post("/dashboard/purchases/{item_id}/delete")
async def post_delete_purchase(item_id: str, agent: PostgresAgent = Depends(get_agent)):
    return respond(await delete_purchase(item_id, agent))

# refunds

@router.post("/dashboard/refunds/upload")
async def post_upload_refunds(rows: list[dict[str, Any]] = Body(...), agent: PostgresAgent = Depends(get_agent)):
    return respond(await upload_refunds(rows, agent))

# labels

@router.post("/dashboard/sales/{order_number}/labels/create")
async def post_create_label(order_number: str, request: Request, agent: PostgresAgent = Depends(get_agent)):
    return respond(await create_label(order_number, None, await request.form(), agent))

@router.post("/dashboard/sales/{order_number}/labels/{tracking_number}/edit")
async def post_update_label(order_number: str, tracking_number: str, request: Request, agent: PostgresAgent = Depends(get_agent)):
    return respond(await update_label(tracking_number, order_number, None, await request.form(), agent))

@router.post("/dashboard/sales/{order_number}/labels/{tracking_number}/delete")
async def post_delete_label(order_number: str, tracking_number: str, agent: PostgresAgent = Depends(get_agent)):
    return respond(await delete_label(tracking_number, order_number, agent))

app.include_router(router)

# auth

@app.post("/login")
async def login(request: Request, auth: AuthAgent = Depends(get_auth)):
    form = await request.form()
    message = await authenticate(None, form, auth)
    if message:
        return {"message": message}
    request.session["user"] = str(form.get("email")).strip().lower()
    return RedirectResponse(paths.DASHBOARD, status_code=303)

@app.post("/signup")
async def signup(request: Request, auth: AuthAgent = Depends(get_auth)):
    message = await sign_up(None, await request.form(), auth)
    if message:
        return {"message": message}
    return RedirectResponse(paths.LOGIN, status_code=303)

@app.post("/logout")
async def logout(request: Request):
    request.session.clear()
    return RedirectResponse(paths.LOGIN, status_code=303)
