# csv_url_loader.py
import io, csv, logging, requests
from typing import List

from models import Component
from data_loader import read_components

log = logging.getLogger(__name__)

def load_components_from_url(url: str, timeout: int = 30) -> List[Component]:
    if not url.lower().startswith(("http://", "https://")):
        raise ValueError("Informe uma URL iniciando com http(s)://")
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    content = resp.content.decode("utf-8-sig", errors="replace")
    comps = read_components(csv.DictReader(io.StringIO(content)))
    log.info("Loaded %d components from %s", len(comps), url)
    return comps
