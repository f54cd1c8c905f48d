import uvicorn

from luct_reports.config import settings
from luct_reports.main import create_app

app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=5001)
