from mangum import Mangum

from todo_api.main import create_app
from todo_api.routers.user_router import router as user_router

app = create_app(title="User Lambda", routers=((user_router, "/users", "Users"),))

handler = Mangum(app)
