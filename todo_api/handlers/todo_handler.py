from mangum import Mangum

from todo_api.main import create_app
from todo_api.routers.todo_router import router as todo_router

app = create_app(title="Todo Lambda", routers=((todo_router, "/todos", "Todos"),))

handler = Mangum(app)
