from source_service.main import run_worker

run_worker()
