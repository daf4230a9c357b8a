from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
import store
from errors import EmployeeAdminError
from logging_config import setup_logging
from routes import auth, employees

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Employee admin API ready (admin user %r, %d seeded employees)",
        config.ADMIN_USERNAME,
        len(store.employees),
    )
    yield


app = FastAPI(title="Employee Admin API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(employees.router)


# ---------- Error rendering: every failure is {"message": ...} ----------

@app.exception_handler(EmployeeAdminError)
async def employee_admin_error_handler(request: Request, exc: EmployeeAdminError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Unparseable request body on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=400, content={"message": "Invalid request body."})


@app.get("/")
def health():
    return {"status": "ok", "service": "employee-admin"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
