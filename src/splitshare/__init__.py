"""SplitShare: общий счёт группы и расчёт взаиморасчётов."""
