# service/store_service.py


def print_stores(executor):
    """Print every store, best reviewed first; return how many were shown."""
    return executor.execute_query_and_print_result(
        "SELECT storeID, address, city, state, isOpen, reviewScore "
        "FROM Store "
        "ORDER BY reviewScore DESC, storeID;"
    )
