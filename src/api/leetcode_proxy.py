"""
Standalone LeetCode proxy
Serves POST /leetcode on its own port for front ends that only need question lookup.
"""
from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import leetcode

app = FastAPI(title="LeetCode Proxy", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(leetcode.router)
