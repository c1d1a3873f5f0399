"""
Push Chess - ルールエンジンとAPIサーバ
"""
