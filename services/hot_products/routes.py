from fastapi import APIRouter, File, HTTPException, UploadFile

from shared.logging import get_logger

from .helpers import DateFormatError
from .models import HotProductsResult
from .reader import InvalidFileError
from .service import get_calculator

router = APIRouter()
logger = get_logger(__name__)


@router.post("/hot-products", response_model=HotProductsResult)
def hot_products_endpoint(
    orders_file: UploadFile = File(..., description="JSON array of orders"),
    products_file: UploadFile = File(..., description="JSON array of products"),
):
    try:
        calculator = get_calculator()
    except Exception:
        logger.exception("Invalid hot products configuration")
        raise HTTPException(
            status_code=500, detail="An error occurred while calculating hot products."
        )

    try:
        return calculator.calculate_files(orders_file.file, products_file.file)
    except InvalidFileError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DateFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Failed to calculate hot products")
        raise HTTPException(
            status_code=500, detail="An error occurred while calculating hot products."
        )
