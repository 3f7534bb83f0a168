from simple_logger import Slogger

# keep test runs from writing into logs/
Slogger.configure(enabled=False)
