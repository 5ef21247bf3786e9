import logging

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
from drinkwithme.core.config import settings
from drinkwithme.routes.auth.auth_routers import auth_router
from drinkwithme.routes.profile.profile_routers import profile_router
from drinkwithme.routes.venue.venue_routers import venue_router
from drinkwithme.routes.admin.admin_routers import admin_router
from drinkwithme.routes.selection.selection_routers import selection_router
from drinkwithme.routes.match.match_routers import match_router
from drinkwithme.routes.chat.chat_routers import chat_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="DrinkWithMe API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(venue_router)
app.include_router(admin_router)
app.include_router(selection_router)
app.include_router(match_router)
app.include_router(chat_router)


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>DrinkWithMe</title>
        </head>
        <body>
            <h1>Welcome to the DrinkWithMe API!</h1>
            <p>See the API docs <a href="/docs">here</a>.</p>
        </body>
    </html>
    """
