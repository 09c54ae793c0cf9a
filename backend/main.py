# backend/main.py
# 실행: uvicorn main:app --reload  (backend/ 디렉터리에서, .env 에 SECRET_KEY 필요)
import os

import uvicorn

from healthapp.main import create_app

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "5001")))
