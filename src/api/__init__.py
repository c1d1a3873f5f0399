"""
Push Chess FastAPI サーバ
"""
