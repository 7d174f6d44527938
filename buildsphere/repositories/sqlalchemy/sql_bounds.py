# SQL INTEGER(64비트 부호 있는 정수) 범위. 이 범위를 벗어난 ID는 DB 드라이버가 바인딩하지 못합니다.
SQL_INTEGER_MIN = -2 ** 63
SQL_INTEGER_MAX = 2 ** 63 - 1


def fits_sql_integer(value: int) -> bool:
    return SQL_INTEGER_MIN <= value <= SQL_INTEGER_MAX
