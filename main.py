import uvicorn

from blogapi.core.config import get_settings
from blogapi.main import create_app

app = create_app()

# uvicorn main:app
# uvicorn main:app --reload
if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("main:app", host=settings.host, port=settings.port)
