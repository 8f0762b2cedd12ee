# main.py
import sys
from pathlib import Path
from fastapi import FastAPI, Request, Form
from fastapi.templating import Jinja2Templates
from fastapi.responses import HTMLResponse, RedirectResponse
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent
sys.path.append(str(ROOT_DIR))

load_dotenv()

from auth import PUBLIC_PATHS, SESSION_COOKIE, create_session_token, read_session_user, verify_admin
from routes import products

app = FastAPI(title="Product Manager")

templates = Jinja2Templates(directory=str(ROOT_DIR / "templates"))

@app.post("/login")
async def login(username: str = Form(...), password: str = Form(...)):
    if not verify_admin(username, password):
        return RedirectResponse(url="/login_page?error=1", status_code=303)
    token = create_session_token(username)
    response = RedirectResponse(url=products.PAGE_PATH, status_code=303)
    response.set_cookie(key=SESSION_COOKIE, value=token, httponly=True, samesite="lax", max_age=86400, secure=True)
    return response

@app.middleware("http")
async def add_login_middleware(request: Request, call_next):
    if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
        return await call_next(request)
    token = request.cookies.get(SESSION_COOKIE)
    user = read_session_user(token)
    if not user:
        response = RedirectResponse(url="/login_page")
        if token:
            response.delete_cookie(SESSION_COOKIE)
        return response
    request.state.user = user
    return await call_next(request)

@app.get("/login_page", response_class=HTMLResponse, include_in_schema=False)
async def get_login_page(request: Request, error: int = 0):
    return templates.TemplateResponse(request, "login.html", {"title": "Login", "error": bool(error)})

@app.get("/", response_class=RedirectResponse, include_in_schema=False)
async def read_root():
    return RedirectResponse(url=products.PAGE_PATH)

# Routers
app.include_router(products.router)
