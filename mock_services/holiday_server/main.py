from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pathlib import Path
import json
import os

app = FastAPI(title="Mock Holiday Server", version="1.0.0")
DATA_FILE = Path(os.environ.get("HOLIDAY_DATA_FILE", Path(__file__).resolve().parent / "holidays.json"))

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/holidays")
def get_holidays():
    holidays = json.loads(DATA_FILE.read_text()) if DATA_FILE.exists() else []
    holidays = sorted(holidays, key=lambda h: h["date"])
    return JSONResponse(content={"success": True, "count": len(holidays), "data": holidays})
