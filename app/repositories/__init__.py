"""레포지토리 패키지: 데이터베이스 쿼리 계층.

Repository package, the database query layer.
Repositories only flush; the request handler commits, so one request is
one transaction.
"""
