from fastapi import FastAPI
from dotenv import load_dotenv

load_dotenv()
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime
import os
import logging
import config
import routers.dashboard as dashboard
import routers.financial_reports as financial_reports
import routers.party_ledger as party_ledger


os.makedirs(config.LOG_DIR, exist_ok=True) # Create the log directory if it doesn't exist

# Create a unique log file name based on current date/time
current_time_str = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
LOG_FILE = os.path.join(config.LOG_DIR, f"app_{current_time_str}.log")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Configure the root logger
logging.basicConfig(
    level=config.LOG_LEVEL,
    format=LOG_FORMAT,
    filename=LOG_FILE, # Log to a file
    filemode='a' # Append to the file if it exists
)

# Also send logs to the console
console_handler = logging.StreamHandler()
console_handler.setLevel(config.LOG_LEVEL)
console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
logging.getLogger().addHandler(console_handler) # Add to the root logger

logger = logging.getLogger(__name__)
logger.info("Application starting up...")
# --- End Logging Configuration ---


app = FastAPI(
    title="Dairy Accounts API",
    version="1.0.0",
    description="Party ledgers, dashboard summaries and profit & loss for a dairy business",
)

# Split the string into a list, stripping any whitespace
allowed_origins = [origin.strip() for origin in config.CORS_ALLOWED_ORIGINS.split(',') if origin.strip()]

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(party_ledger.router)
app.include_router(dashboard.router)
app.include_router(financial_reports.router)

@app.get("/")
async def test_route():
    return {"message": "Welcome to the Dairy Accounts API!"}
