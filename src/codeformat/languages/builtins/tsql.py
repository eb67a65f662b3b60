"""T-SQL language descriptor (case-insensitive).

Server globals (``@@ROWCOUNT``) are listed as preprocessor words.
"""

from codeformat.languages.descriptor import LanguageDescriptor

TSQL = LanguageDescriptor(
    name="T-SQL",
    keywords=(
        "ADD ALL ALTER AND ANY AS ASC BEGIN BETWEEN BREAK BY CASCADE CASE CAST "
        "CHECK CLOSE COLUMN COMMIT CONSTRAINT CONTINUE CONVERT CREATE CROSS "
        "CURSOR DATABASE DEALLOCATE DECLARE DEFAULT DELETE DESC DISTINCT DROP "
        "ELSE END EXEC EXECUTE EXISTS FETCH FOR FOREIGN FROM FULL FUNCTION GO "
        "GOTO GRANT GROUP HAVING IDENTITY IF IN INDEX INNER INSERT INTO IS JOIN "
        "KEY LEFT LIKE NOT NULL OF OFF ON OPEN OR ORDER OUTER PRIMARY PRINT "
        "PROCEDURE RAISERROR REFERENCES RETURN REVOKE RIGHT ROLLBACK SELECT SET "
        "TABLE THEN TOP TRAN TRANSACTION TRIGGER TRUNCATE UNION UNIQUE UPDATE "
        "USE VALUES VIEW WHEN WHERE WHILE WITH"
    ),
    preprocessors=(
        "@@ERROR @@FETCH_STATUS @@IDENTITY @@ROWCOUNT @@SERVERNAME "
        "@@SPID @@TRANCOUNT @@VERSION"
    ),
    string_pattern=r"N?'(?:[^']|'')*'",
    comment_pattern=r"--[^\n]*|/\*.*?\*/",
    case_sensitive=False,
)
