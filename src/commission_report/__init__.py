"""거래 로그 기반 계정별 커미션 리포트"""

__version__ = "0.1.0"
