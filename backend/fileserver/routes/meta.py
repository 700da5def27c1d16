from __future__ import annotations


def root():
    """Get basic information about the File Server API"""
    return {
        "message": "File Server API is running",
        "endpoints": ["/get_my_file"],
    }


def health_check():
    """Check if the API is running and healthy"""
    return {"status": "healthy"}
