import logging
from concurrent.futures import ThreadPoolExecutor

logger = logging.getLogger(__name__)


def precompute_appearance(records, cache, workers=4):
    """Fill cache with the appearance of every record using a thread pool.

    Args:
        records: Sequence of ThemeRecord
        cache: AppearanceCache shared by all workers
        workers: Pool size; 1 runs inline

    Returns:
        dict of record id -> Appearance, in record order
    """
    records = list(records)
    if workers <= 1:
        appearances = [cache.get(record) for record in records]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            appearances = list(pool.map(cache.get, records))
    logger.info("Precomputed appearance for %d records", len(records))
    return {record.id: appearance for record, appearance in zip(records, appearances)}
