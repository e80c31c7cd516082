"""
Trip Distance Proxy
===================
Serves the ``distanceMatrix`` callable (``POST /distanceMatrix``) in front
of the Distance Matrix API.  Set ``DISTANCE_API_KEY`` in the environment
or ``.env``; without it every call answers ``FAILED_PRECONDITION``.

    uvicorn main:app --reload
"""

import uvicorn

from tripdistance.api.app import create_app

app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
