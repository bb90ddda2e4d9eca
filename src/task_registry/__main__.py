from task_registry.main import serve

if __name__ == "__main__":
    serve()
