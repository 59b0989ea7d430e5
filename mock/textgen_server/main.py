from fastapi import FastAPI
from pydantic import BaseModel
import json
import re

app = FastAPI(title="Mock Text Generation Server", version="1.0.0")

AMOUNT_PATTERN = re.compile(r"Investment Amount: ([0-9.]+)")
RISK_PATTERN = re.compile(r"Risk Tolerance: (\w+)")
TENURE_BY_RISK = {"low": "1 year", "medium": "3 years", "high": "5 years"}


class GenerateRequest(BaseModel):
    model: str
    prompt: str
    format: str | None = None
    stream: bool = False
    options: dict = {}


@app.get("/health")
def health(): return {"status": "ok"}

@app.post("/api/generate")
def generate(body: GenerateRequest):
    amount = AMOUNT_PATTERN.search(body.prompt)
    risk = RISK_PATTERN.search(body.prompt)
    tenure = TENURE_BY_RISK.get(risk.group(1) if risk else "", "3 years")
    reply = {
        "recommendedTenure": tenure,
        "recommendedAmount": amount.group(1) if amount else "100000",
        "rationale": f"A {tenure} deposit matches the stated goals and risk tolerance.",
    }
    return {"model": body.model, "response": json.dumps(reply), "done": True}
