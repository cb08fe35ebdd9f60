from fastapi.templating import Jinja2Templates

from storefront.config import SITE_DESCRIPTION, SITE_TITLE, TEMPLATES_DIR
from storefront.pricing import format_price
from storefront.pricing.price_filter import format_query_number

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["price"] = format_price
templates.env.filters["query_number"] = format_query_number
templates.env.globals["site_title"] = SITE_TITLE
templates.env.globals["site_description"] = SITE_DESCRIPTION
