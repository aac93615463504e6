from exam_submission.main import main

if __name__ == "__main__":
    main()
