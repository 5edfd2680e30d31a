def fibonacci_source(iterations: int = 50) -> str:
    return f"""чо люблю сэмки йоба
чо люблю пиво йоба
чо люблю яга йоба
чо люблю итерации йоба
чо пиво это 1 йоба
чо яга это 2 йоба

чо усеки результат это
чо покажь итерации йоба
чо покажь сэмки йоба
йоба

чо усеки фибоначчи это
чо сэмки это пиво и яга йоба
чо пиво это яга йоба
чо яга это сэмки йоба
чо итерации это итерации и 1 йоба
чо есть итерации {iterations} тада хуйни результат или хуйни фибоначчи йоба
йоба

чо хуйни фибоначчи йоба"""


def countdown_source(start: int) -> str:
    return f"""чо люблю счётчик йоба
чо счётчик это {start} йоба

чо усеки отсчёт это
чо покажь счётчик йоба
чо отожми счётчик 1 йоба
чо есть 1 счётчик тада хуйни отсчёт или иди нахуй йоба
йоба

чо хуйни отсчёт йоба"""
